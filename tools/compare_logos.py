# tools/compare_logos.py
import argparse
import json

import matplotlib.pyplot as plt


def load_json(path):
    try:
        with open(path) as f:
            return json.load(f)
    except FileNotFoundError:
        return {}


def information_curve(logo):
    cols = logo.get("columns", [])
    pos = [c["position"] for c in cols]
    ic = [c["information_content"] for c in cols]
    return pos, ic


def main(argv=None):
    parser = argparse.ArgumentParser("Compare information content of two logos")
    parser.add_argument("--a", required=True, help="First logo JSON")
    parser.add_argument("--b", required=True, help="Second logo JSON")
    parser.add_argument("--label-a", default="A")
    parser.add_argument("--label-b", default="B")
    parser.add_argument("--out", default="data/cache/logo_compare.png")
    args = parser.parse_args(argv)

    logo_a = load_json(args.a)
    logo_b = load_json(args.b)
    pos_a, ic_a = information_curve(logo_a)
    pos_b, ic_b = information_curve(logo_b)

    # None marks a NaN/inf column; matplotlib leaves a break in the line
    ic_a = [float("nan") if v is None else v for v in ic_a]
    ic_b = [float("nan") if v is None else v for v in ic_b]

    fig, ax = plt.subplots(figsize=(max(10, max(len(pos_a), len(pos_b)) // 3), 4))
    ax.plot(pos_a, ic_a, label=args.label_a, color="blue", linewidth=1.5)
    ax.plot(pos_b, ic_b, label=args.label_b, color="red", linewidth=1.5, alpha=0.7)
    ax.axhline(0, color="grey", linewidth=0.8)
    ax.set_xlabel("Position")
    ax.set_ylabel("Information content (bits)")
    ax.set_title(f"Information content: {args.label_a} vs {args.label_b}")
    ax.legend(fontsize="small")
    plt.tight_layout()
    plt.savefig(args.out, dpi=150)
    plt.close(fig)
    print(f"[Compare] Figure saved to {args.out}")

    print("\n=== Numerical Summary ===")
    print(
        f"{args.label_a}: {len(pos_a)} columns, {logo_a.get('sequence_count', 0)} sequences,"
        f" type={logo_a.get('sequence_type', '?')}"
    )
    print(
        f"{args.label_b}: {len(pos_b)} columns, {logo_b.get('sequence_count', 0)} sequences,"
        f" type={logo_b.get('sequence_type', '?')}"
    )
    shared = min(len(ic_a), len(ic_b))
    diffs = [abs(x - y) for x, y in zip(ic_a[:shared], ic_b[:shared]) if x == x and y == y]
    if diffs:
        print(f"Max |ΔIC| over {len(diffs)} shared columns: {max(diffs):.4f} bits")
    else:
        print("→ No comparable columns")


if __name__ == "__main__":
    main()

import json
import math
import sys

TOL = 1e-9


def _same(a, b) -> bool:
    if a is None or b is None:
        return a is None and b is None
    return math.isclose(a, b, rel_tol=0.0, abs_tol=TOL)


def validate(exp: dict, act: dict) -> bool:
    ok = True

    # sequence type & count: must match exactly
    for k in ("sequence_type", "sequence_count"):
        if act.get(k) != exp.get(k):
            print(f"❌ {k} mismatch")
            ok = False

    exp_cols = exp.get("columns", [])
    act_cols = act.get("columns", [])
    if len(exp_cols) != len(act_cols):
        print(f"❌ column count mismatch: expected {len(exp_cols)}, got {len(act_cols)}")
        return False

    for e, a in zip(exp_cols, act_cols):
        if not _same(e["information_content"], a["information_content"]):
            print(
                f"❌ position {e['position']}: information content "
                f"{a['information_content']} != {e['information_content']}"
            )
            ok = False
    return ok


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    with open(argv[0]) as f:
        exp = json.load(f)
    with open(argv[1]) as f:
        act = json.load(f)

    ok = validate(exp, act)
    print("✅ PASS" if ok else "❌ FAIL")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())

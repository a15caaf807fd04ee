from __future__ import annotations

import argparse
import random
from typing import List

import jalcal
from jalcal.core.time import JDN_UNIX_EPOCH, SECONDS_PER_DAY


def parse_engines(s: str) -> List[str]:
    # "arithmetic,borkowski" -> ["arithmetic", "borkowski"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    engine: str,
    N: int,
    jdn_start: int,
    jdn_end: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        jdn = random.randint(jdn_start, jdn_end)
        g0 = jalcal.jdn_to_gregorian(jdn)

        j = jalcal.gregorian_to_jalali(*g0, engine=engine)
        back = jalcal.jalali_to_gregorian(*j, engine=engine) if j else None
        if back != g0:
            failures += 1
            print("\nFAIL (gregorian -> jalali -> gregorian)")
            print("engine:", engine)
            print("g0:", g0)
            print("jalali:", j)
            print("back:", back)
            if failures >= max_failures:
                return failures

        ts = (jdn - JDN_UNIX_EPOCH) * SECONDS_PER_DAY
        ju = jalcal.unix_to_jalali(ts, engine=engine)
        ts_back = jalcal.jalali_to_unix(*ju, engine=engine) if ju else None
        if ju != j or ts_back != ts:
            failures += 1
            print("\nFAIL (unix -> jalali -> unix)")
            print("engine:", engine)
            print("ts:", ts)
            print("jalali:", ju, "expected", j)
            print("ts_back:", ts_back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> jalali -> gregorian, unix -> jalali -> unix.")
    p.add_argument("--engines", type=str, default="arithmetic,borkowski", help="Comma-separated engine list.")
    p.add_argument("--N", type=int, default=20000, help="Trials per engine.")
    p.add_argument("--start", type=str, default="0622-03-22", help="Start Gregorian date Y-M-D.")
    p.add_argument("--end", type=str, default="3000-12-31", help="End Gregorian date Y-M-D.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per engine.")
    args = p.parse_args(argv)

    start = jalcal.parse_date_fields(args.start, "-")
    end = jalcal.parse_date_fields(args.end, "-")
    jdn_start = jalcal.gregorian_to_jdn(*start) if start else None
    jdn_end = jalcal.gregorian_to_jdn(*end) if end else None
    if jdn_start is None or jdn_end is None:
        raise SystemExit("--start/--end must be valid Gregorian dates")
    if jdn_end < jdn_start:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for eng in parse_engines(args.engines):
        print(f"Testing {eng} ...")
        total_fail += roundtrip_test(eng, N=args.N, jdn_start=jdn_start, jdn_end=jdn_end,
                                     seed=args.seed, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())

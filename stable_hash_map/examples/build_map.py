# ==================================================
# examples/build_map.py
# ==================================================
import argparse, sys
from stable_hash_map import HashMap, bucket_stats, xxh64_hash, blake2b_hash

HASHERS = {"builtin": hash, "xxh64": xxh64_hash, "blake2b": blake2b_hash}

def main(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("count", type=int, help="number of keys to insert")
    p.add_argument("--erase", type=int, default=0, help="erase the first N keys afterwards")
    p.add_argument("--hasher", choices=sorted(HASHERS), default="builtin")
    p.add_argument("--base-buckets", type=int, default=None)
    args = p.parse_args(argv)

    kw = {"hasher": HASHERS[args.hasher]}
    if args.base_buckets is not None:
        kw["base_buckets"] = args.base_buckets
    hm = HashMap(**kw)

    last = None
    for i in range(args.count):
        last, _ = hm.insert(i, f"value_{i}")
    for i in range(min(args.erase, args.count)):
        hm.erase(i)

    if last is not None and args.erase < args.count and hm.find(args.count - 1) is not last:
        print(f"error: handle for key {args.count - 1} moved during resize", file=sys.stderr)
        return 1

    print(f"size {hm.size()}  buckets {hm.bucket_count()}")
    for field, value in bucket_stats(hm)._asdict().items():
        print(f"  {field:<14} {value}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())

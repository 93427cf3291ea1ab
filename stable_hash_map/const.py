# ==================================================
# stable_hash_map/const.py
# ==================================================
import os

BASE_BUCKETS  = int(os.getenv("STABLE_HASH_MAP_BASE_BUCKETS", "10"))  # minimum index width
FULLNESS_COEF = 2         # expand once size * 2 > bucket_count  (load > 0.5)
RESIZE_COEF   = 2         # width is doubled / halved one step per resize

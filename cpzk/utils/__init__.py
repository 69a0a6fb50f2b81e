from cpzk.utils.arith import ensure_bn, mod_exp, random_below, hash_to_subgroup

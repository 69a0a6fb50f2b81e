# 1536-bit MODP group from RFC 3526. The prime is safe, so q = (p - 1) / 2.
DEFAULT_P_HEX = (
    "FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD1"
    "29024E088A67CC74020BBEA63B139B22514A08798E3404DD"
    "EF9519B3CD3A431B302B0A6DF25F14374FE1356D6D51C245"
    "E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7ED"
    "EE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3D"
    "C2007CB8A163BF0598DA48361C55D39A69163FA8FD24CF5F"
    "83655D23DCA3AD961C62F356208552BB9ED529077096966D"
    "670C354E4ABC9804F1746C08CA237327FFFFFFFFFFFFFFFF"
)
DEFAULT_G = 2

# Nobody knows log_g(h) for a generator derived from a public label.
DEFAULT_H_LABEL = b"cpzk default generator h"

# Small group used in examples and tests. Far too small to be secure.
TOY_P = 23
TOY_Q = 11
TOY_G = 2
TOY_H = 3

import logging
import time

import fastecdsa.curve as curvelib

from zkshuffle.eccwrapper import Fastecdsa as ECCobj
from zkshuffle.serialization import dumps, loads
from zkshuffle.toolbox import Toolbox

logging.basicConfig(level=logging.INFO,
                    format='%(asctime)s %(name)s %(levelname)s %(message)s')

curve = ECCobj(curvelib.brainpoolP160r1)

node_ids = ["Alice", "Bob", "Charlie"]
m = 4
n = 8
N = 32
M = 3

# Key Shares ------------------------------------------------------------------
secret_keys = curve.rand_gen.get_random_array(M)
public_key = curve.identity
for k in secret_keys:
    public_key = curve.addition(public_key,
                                curve.multiplication(k, curve.generator))

# Instantiate Toolbox objects -------------------------------------------------
P_Toolbox = [Toolbox(curve, m, n, public_key, secret_keys[i])
             for i in range(M)]

# CK Share Generation ---------------------------------------------------------
ck_shares = [P_Toolbox[i].shuffle_baygro_ck_generate() for i in range(M)]

# CK Share Combination --------------------------------------------------------
for i in range(M):
    empt_list = [list(ck_shares[j]) for j in range(M) if j != i]
    assert P_Toolbox[i].shuffle_baygro_ck_combine(*empt_list)

# Register Public Key Shares --------------------------------------------------
for i in range(M):
    assert P_Toolbox[i].set_public_key_shares(
        *[P_Toolbox[j].public_key_share_own for j in range(M) if j != i])

# Force Cards To Curve and Mask -----------------------------------------------
cards_raw = P_Toolbox[0].init_cards_to_curve()
ciphers = P_Toolbox[0].enc_cards(public_key, cards_raw, N)

# Shuffle Prove and Verify ----------------------------------------------------
for i in range(M):
    start = time.time()
    ciphers_out, proof = P_Toolbox[i].shuffle_shuffle_and_proof(ciphers)
    wire = dumps(proof)
    print("%s shuffled %d cards in %.2fs, proof has %d bytes"
          % (node_ids[i], N, time.time() - start, len(wire)))

    for j in range(M):
        if j != i:
            start = time.time()
            assert P_Toolbox[j].shuffle_baygro_verify(ciphers, ciphers_out,
                                                      loads(wire, curve))
            print("  %s verified in %.2fs" % (node_ids[j],
                                              time.time() - start))
    ciphers = ciphers_out

# Open All Cards --------------------------------------------------------------
cards_unmasked = []
for k in range(N):
    empt_list = [P_Toolbox[i].dec_generate(ciphers[k]) for i in range(1, M)]
    card = P_Toolbox[0].dec_combine(ciphers[k], *empt_list)
    cards_unmasked.append(P_Toolbox[0].dec_index_raw_card(cards_raw, card))

# Print Result ----------------------------------------------------------------
print("-----------------------------------------")
print("MIXED ORDER:")
print(cards_unmasked)
print("-----------------------------------------")
assert sorted(cards_unmasked) == list(range(N))

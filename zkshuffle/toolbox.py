# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# toolbox.py
#
# 18.10.2026
#
# @desc: Facade for one mix node or card player: common commitment key,
#        masking and re-masking with proofs, verifiable shuffles and
#        threshold reveal of masked cards.
# ===================================================================
import logging

import zkshuffle.proofs as proofs
from zkshuffle.bayergroth import (BayGroProver, BayGroVerifier,
                                  ShuffleStatement, ShuffleWitness)
from zkshuffle.config import PublicConfig
from zkshuffle.elgamal import enc, remask, dec
from zkshuffle.pedersen import CommitKey

logger = logging.getLogger(__name__)


class Toolbox:
    """Operations of one node on a deck of N = m*n masked cards

    Attributes:
        curve (ECCobj): elliptic curve
        m (int): rows of the deck layout
        n (int): columns of the deck layout, generators in the commit key
        N (int): deck size
        public_key (ShortPoint): joint masking key, sum of all key shares
        secret_key (int): own key share, None for nodes that only verify
        public_key_share_own (ShortPoint): secret_key*G
        public_key_shares (List[ShortPoint]): registered key shares of the
            other nodes, reveal tokens are only accepted for these
        ck_secret_keys (List[int]): discrete logs of ck_share
        ck_share (CommitKey): own contribution to the commit key
        ck_share_proofs (List[List]): Schnorr proof per point of ck_share
        ck_creation_successful (List[List[bool]]): proof results per
            received share
        commit_key (CommitKey): joint commit key
        config (PublicConfig): shuffle parameters, set once commit_key is
            known
    """
    def __init__(self, curve, m, n, public_key, secret_key=None):
        self.curve = curve
        self.m = m
        self.n = n
        self.N = m * n
        self.public_key = public_key

        self.secret_key = secret_key
        self.public_key_share_own = None
        if secret_key is not None:
            self.public_key_share_own = curve.multiplication(
                secret_key, curve.generator)
        self.public_key_shares = None

        self.ck_secret_keys = None
        self.ck_share = None
        self.ck_share_proofs = None
        self.ck_creation_successful = None
        self.commit_key = None
        self.config = None

    # cards -------------------------------------------------------------------
    def init_cards_to_curve(self, list_of_cards=None):
        """Encode card values as points value*G

        Args:
            list_of_cards (List[int]): card values, 1, ... , N by default

        Returns:
            List[ShortPoint]: open cards
        """
        if list_of_cards is None:
            list_of_cards = range(1, self.N + 1)
        G = self.curve.generator
        return [self.curve.multiplication(value, G) for value in list_of_cards]

    # commit key --------------------------------------------------------------
    def shuffle_baygro_ck_generate(self):
        """Own share of the commit key. Nobody may know the discrete logs of
        the joint key, so every node adds a share and proves knowledge of
        the logs of its own points.

        Returns:
            CommitKey, List[List]: share and one PoK per point
        """
        self.ck_share, self.ck_secret_keys = CommitKey.generate(self.curve,
                                                                self.n)
        G = self.curve.generator
        self.ck_share_proofs = [
            proofs.PokProver(self.curve, G, point, k).pok_nizk()
            for point, k in zip(self.ck_share.to_list(), self.ck_secret_keys)]

        return self.ck_share, self.ck_share_proofs

    def shuffle_baygro_ck_combine(self, *args):
        """Check the shares of all other nodes and add them to the own share

        Args:
            *args ([CommitKey, List[List]]): share and proofs per node

        Returns:
            bool: True if every proof holds and commit_key is set
        """
        G = self.curve.generator
        self.ck_creation_successful = []
        for share, share_proofs in args:
            points = share.to_list()
            results = [proofs.PokVerifier(self.curve, G, point).pok_nizk(*proof)
                       for point, proof in zip(points, share_proofs)]
            if len(share_proofs) != len(points) or len(points) != self.n:
                results.append(False)
            self.ck_creation_successful.append(results)

        if not all(all(results) for results in self.ck_creation_successful):
            logger.warning('commitment key share rejected')
            return False

        self.commit_key = self.ck_share.combine(self.curve,
                                                *[arg[0] for arg in args])
        self.config = PublicConfig(self.curve, self.public_key,
                                   self.commit_key, self.m, self.n)
        return True

    # shuffle -----------------------------------------------------------------
    def shuffle_mix_remask_cards(self, enc_cards, size):
        """out[i] = enc_cards[pi[i]] + Enc(O; rho[i]) for a fresh pi, rho

        Returns:
            List[List[ShortPoint]], List[int], List[int]: out, rho, pi
        """
        permuted_cards, pi = self.shuffle_permute_cards(enc_cards, size)
        shuffled_cards, rho = self.re_enc_cards(self.public_key,
                                                permuted_cards, size)
        return shuffled_cards, rho, pi

    def shuffle_permute_cards(self, enc_cards, size):
        """Returns:
            List[List[ShortPoint]], List[int]: enc_cards reordered by a
            uniform pi, pi
        """
        pi = self.curve.rand_gen.get_random_permutation(size)
        return [enc_cards[i] for i in pi], pi

    def shuffle_baygro_prove(self, ciphers_in, ciphers_out, rho, pi):
        """Shuffle argument for ciphers_out[i] = ciphers_in[pi[i]] +
        Enc(O; rho[i])

        Returns:
            ShuffleProof
        """
        statement = ShuffleStatement(ciphers_in, ciphers_out)
        return BayGroProver(self.config, statement,
                            ShuffleWitness(pi, rho)).prove()

    def shuffle_baygro_verify(self, ciphers_in, ciphers_out, proof):
        """
        Args:
            ciphers_in (List[List[ShortPoint]]): deck handed to the mixer
            ciphers_out (List[List[ShortPoint]]): deck returned by it
            proof (ShuffleProof): the mixer's shuffle argument

        Returns:
            bool: True if ciphers_out is a re-masked permutation of
            ciphers_in
        """
        statement = ShuffleStatement(ciphers_in, ciphers_out)
        return BayGroVerifier(self.config, statement).verify(proof)

    def shuffle_shuffle_and_proof(self, ciphers_in):
        """One mix-net round on a full deck

        Returns:
            List[List[ShortPoint]], ShuffleProof: new deck and its proof
        """
        ciphers_out, rho, pi = self.shuffle_mix_remask_cards(ciphers_in,
                                                             self.N)
        return ciphers_out, self.shuffle_baygro_prove(ciphers_in, ciphers_out,
                                                      rho, pi)

    # masking -----------------------------------------------------------------
    def enc_cards(self, pubkey, forcedcard, size, k=None):
        """Enc(card; k) = [k*G, card + k*pubkey] for the first size cards

        Args:
            pubkey (ShortPoint): masking key
            forcedcard (List[ShortPoint]): open cards
            size (int): number of cards to mask
            k (List[int]): masking values, fresh random ones if None

        Returns:
            List[List[ShortPoint]]: masked cards
        """
        if k is None:
            k = self.curve.rand_gen.get_random_array(size)
        return [enc(self.curve, pubkey, card, k_i)
                for card, k_i in zip(forcedcard[:size], k)]

    def re_enc_cards(self, pubkey, enc_cards, size=0):
        """Add Enc(O; k[i]) to the first size masked cards

        Returns:
            List[List[ShortPoint]], List[int]: re-masked cards, k
        """
        k = self.curve.rand_gen.get_random_array(size)
        return ([remask(self.curve, pubkey, cipher, k_i)
                 for cipher, k_i in zip(enc_cards[:size], k)], k)

    def remask_prove(self, cipher, remasked, k):
        """DLEQ(G, k*G, pk, k*pk) for remasked = cipher + Enc(O; k)

        Returns:
            List[int]: challenge and response
        """
        statement = proofs.remask_statement(self.curve, self.public_key,
                                            cipher, remasked)
        return proofs.PeqProver(self.curve, *statement, k).peq_nizk()

    def remask_verify(self, cipher, remasked, proof):
        """
        Returns:
            bool: True if remasked is a re-masking of cipher
        """
        statement = proofs.remask_statement(self.curve, self.public_key,
                                            cipher, remasked)
        return proofs.PeqVerifier(self.curve, *statement).peq_nizk(*proof)

    # reveal ------------------------------------------------------------------
    def set_public_key_shares(self, *shares):
        """Register the key shares of all other nodes. They are kept only if
        they add up to public_key together with public_key_share_own.

        Args:
            *shares (ShortPoint): key share of every other node

        Returns:
            bool: True if the shares were registered
        """
        total = self.public_key_share_own
        for share in shares:
            if not self.curve.isoncurve(share):
                logger.warning('public key share is not on the curve')
                return False
            total = self.curve.addition(total, share)

        if total != self.public_key or len(set(shares)) != len(shares):
            logger.warning('public key shares do not add up to the public key')
            return False

        self.public_key_shares = list(shares)
        return True

    def dec_generate(self, c):
        """Reveal token d = secret_key*c[0] with a proof that the token uses
        the same key as public_key_share_own

        Args:
            c (List[ShortPoint]): masked card

        Returns:
            List[ShortPoint], List[int]: [pk share, c[0], d] and
            DLEQ(c[0], d, G, pk share)
        """
        d = self.curve.multiplication(self.secret_key, c[0])
        statement = proofs.reveal_statement(self.curve,
                                            self.public_key_share_own, c, d)
        proof = proofs.PeqProver(self.curve, *statement,
                                 self.secret_key).peq_nizk()
        return [self.public_key_share_own, c[0], d], proof

    def dec_combine(self, c, *args):
        """Open a masked card with the own key share and the reveal tokens
        of all other nodes: c[1] - sum(d_i). Needs set_public_key_shares.

        Args:
            c (List[ShortPoint]): masked card
            *args: output of dec_generate of every other node

        Returns:
            ShortPoint: open card, None if a token or its proof is bad or
            the tokens do not come from exactly the registered key shares
        """
        if self.public_key_shares is None:
            logger.warning('reveal without registered public key shares')
            return None
        senders = [data[0] for data, _ in args]
        if len(senders) != len(self.public_key_shares) or \
                set(senders) != set(self.public_key_shares):
            logger.warning('reveal tokens do not match the registered '
                           'public key shares')
            return None

        tokens = self.curve.multiplication(self.secret_key, c[0])
        for (share, c_1, d), proof in args:
            if c_1 != c[0]:
                logger.warning('reveal token for a different card')
                return None
            statement = proofs.reveal_statement(self.curve, share, c, d)
            if not proofs.PeqVerifier(self.curve, *statement).peq_nizk(*proof):
                return None
            tokens = self.curve.addition(tokens, d)

        return self.curve.subtraction(c[1], tokens)

    def dec_with_seckey(self, seckey, enc_cards, size=0):
        """Open the first size cards with the full secret key

        Returns:
            List[ShortPoint]: open cards
        """
        return [dec(self.curve, seckey, cipher) for cipher in enc_cards[:size]]

    @staticmethod
    def dec_index_raw_card(cards_raw, card):
        """
        Args:
            cards_raw (List[ShortPoint]): open cards of the deck
            card (ShortPoint): opened card

        Returns:
            int: position of card in cards_raw, None if unknown
        """
        if card is None or card not in cards_raw:
            return None
        return cards_raw.index(card)

import pytest
import numpy as np
import numpy.testing as npt

from qamber.core import demodulation, constellations


class TestMakeDecision(object):
    @pytest.mark.parametrize("M", [4, 16])
    def test_noiseless(self, M):
        syms, enc = constellations.get_constellation(M)
        idx = np.random.randint(0, M, 1000)
        det, dist, idx_rx = demodulation.make_decision(syms[idx], syms)
        npt.assert_array_equal(idx_rx, idx)
        npt.assert_array_equal(det, syms[idx])
        npt.assert_allclose(dist, 0, atol=1e-20)

    @pytest.mark.parametrize("M", [4, 16])
    def test_small_offset(self, M):
        syms, enc = constellations.get_constellation(M)
        d = np.min(abs(np.diff(np.unique(syms.real))))
        idx = np.arange(M)
        det, dist, idx_rx = demodulation.make_decision(syms[idx] + d/4*(1+1j)*0.9, syms)
        npt.assert_array_equal(idx_rx, idx)

    def test_tie_lowest_index(self):
        syms, enc = constellations.get_constellation(4)
        # origin is equidistant to all four points
        det, dist, idx = demodulation.make_decision(np.array([0j, 0j]), syms)
        npt.assert_array_equal(idx, [0, 0])

    def test_tie_between_two(self):
        syms, enc = constellations.get_constellation(4)
        # on the imaginary axis in the upper half plane, between index 0 and 1
        det, dist, idx = demodulation.make_decision(np.array([0.5j]), syms)
        assert idx[0] == 0

    def test_far_away_sample(self):
        syms, enc = constellations.get_constellation(16)
        det, dist, idx = demodulation.make_decision(np.array([10+10j]), syms)
        assert syms[idx[0]] == syms[np.argmax(syms.real + syms.imag)]

    def test_chunked(self, monkeypatch):
        monkeypatch.setattr(demodulation, "NMAX", 16*7)
        syms, enc = constellations.get_constellation(16)
        idx = np.random.randint(0, 16, 1001)
        det, dist, idx_rx = demodulation.make_decision(syms[idx], syms)
        npt.assert_array_equal(idx_rx, idx)


class TestBitErrors(object):
    @pytest.mark.parametrize("M", [4, 16])
    def test_hamming_self(self, M):
        syms, enc = constellations.get_constellation(M)
        for i in range(M):
            assert demodulation.hamming_distance(enc[i], enc[i]) == 0

    def test_hamming(self):
        assert demodulation.hamming_distance([1, 0, 1, 1], [0, 0, 1, 0]) == 2
        npt.assert_array_equal(demodulation.hamming_distance([[1, 0], [1, 1]], [[1, 0], [0, 0]]), [0, 2])

    @pytest.mark.parametrize("M", [4, 16])
    def test_no_errors(self, M):
        syms, enc = constellations.get_constellation(M)
        idx = np.arange(M)
        assert demodulation.count_bit_errors(idx, idx, enc) == 0

    def test_qpsk_errors(self):
        syms, enc = constellations.get_constellation(4)
        # 00->01 one error, 00->11 two errors, 01->10 two errors, 10->10 none
        nerr = demodulation.count_bit_errors(np.array([1, 2, 3, 3]), np.array([0, 0, 1, 3]), enc)
        assert nerr == 5

    @pytest.mark.parametrize("M", [4, 16])
    def test_all_pairs(self, M):
        syms, enc = constellations.get_constellation(M)
        idx_rx, idx_tx = np.meshgrid(np.arange(M), np.arange(M))
        nerr = demodulation.count_bit_errors(idx_rx.flatten(), idx_tx.flatten(), enc)
        # every bit position differs in exactly half of all pairs
        assert nerr == M * M * np.log2(M) / 2

    def test_shape_mismatch(self):
        syms, enc = constellations.get_constellation(4)
        with pytest.raises(AssertionError):
            demodulation.count_bit_errors(np.arange(3), np.arange(4), enc)


class TestDemodulateQAM(object):
    @pytest.mark.parametrize("M", [4, 16])
    def test_own_symbols(self, M):
        syms, enc = constellations.get_constellation(M)
        idx = np.random.randint(0, M, 10**4)
        idx_rx, nerr = demodulation.demodulate_qam(syms[idx], syms, enc, idx)
        assert nerr == 0
        npt.assert_array_equal(idx_rx, idx)

    def test_neighbour_single_bit_error(self):
        syms, enc = constellations.get_constellation(16)
        d = 2/np.sqrt(10)
        # move every symbol one grid step to the right wherever that stays on the grid
        idx = np.nonzero(syms.real < 2/np.sqrt(10))[0]
        idx_rx, nerr = demodulation.demodulate_qam(syms[idx] + d, syms, enc, idx)
        assert nerr == idx.size

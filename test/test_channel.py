import pytest
import numpy as np
import numpy.testing as npt

from qamber import helpers
from qamber.core import channel, constellations


class TestNoisePower(object):
    @pytest.mark.parametrize("M", [4, 16])
    def test_zero_db(self, M):
        syms, enc = constellations.get_constellation(M)
        pn = channel.cal_noise_power(0, enc.shape[1], np.mean(abs(syms)**2))
        npt.assert_allclose(pn, 1/np.log2(M))

    @pytest.mark.parametrize("ebn0", [-5, 0, 3.5, 10, 20])
    def test_formula(self, ebn0):
        npt.assert_allclose(channel.cal_noise_power(ebn0, 4, 2.), 2./(10**(ebn0/10)*4))

    def test_infinite_ebn0(self):
        assert channel.cal_noise_power(np.inf, 2) == 0

    def test_zero_bits(self):
        with pytest.raises(ZeroDivisionError):
            channel.cal_noise_power(10, 0)

    def test_zero_bits_numpy_power(self):
        syms, enc = constellations.get_constellation(4)
        with pytest.raises(ZeroDivisionError):
            channel.cal_noise_power(0., 0, helpers.cal_symbol_power(syms))

    @pytest.mark.parametrize("ebn0", [3100., 4000., 1e300])
    def test_very_large_ebn0(self, ebn0):
        assert channel.cal_noise_power(ebn0, 2, 1.) == 0


class TestAWGN(object):
    @pytest.mark.parametrize("pn", [0.01, 0.5, 2.])
    def test_noise_power(self, pn):
        sig = np.zeros(10**6, dtype=np.complex128)
        out = channel.add_awgn(sig, pn, channel.get_random_state(1))
        npt.assert_allclose(np.mean(abs(out)**2), pn, rtol=0.01)
        npt.assert_allclose(np.var(out.real), pn/2, rtol=0.01)
        npt.assert_allclose(np.var(out.imag), pn/2, rtol=0.01)

    def test_zero_noise(self):
        syms, enc = constellations.get_constellation(16)
        out = channel.add_awgn(syms, 0.)
        npt.assert_array_equal(out, syms)

    @pytest.mark.parametrize("dtype", [np.complex64, np.complex128])
    def test_dtype(self, dtype):
        sig = np.ones(100, dtype=dtype)
        out = channel.add_awgn(sig, 0.1)
        assert np.dtype(dtype) is out.dtype

    def test_seeded(self):
        sig = np.zeros(1000, dtype=np.complex128)
        o1 = channel.add_awgn(sig, 1., channel.get_random_state(5))
        o2 = channel.add_awgn(sig, 1., channel.get_random_state(5))
        npt.assert_array_equal(o1, o2)


class TestRandomState(object):
    def test_passthrough(self):
        R = np.random.RandomState(3)
        assert channel.get_random_state(R) is R

    def test_new_state(self):
        assert isinstance(channel.get_random_state(None), np.random.RandomState)

# -*- coding: utf-8 -*-
#  This file is part of qamber.
#
#  qamber is free software: you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation, either version 3 of the License, or
#  (at your option) any later version.
#
#  qamber is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU General Public License for more details.
#
#  You should have received a copy of the GNU General Public License
#  along with qamber.  If not, see <http://www.gnu.org/licenses/>.
#
# Copyright 2018 The qamber developers

"""
AWGN channel model and the conversion of Eb/N0 into a noise power.
"""
import numpy as np

from qamber.helpers import dB2lin


def get_random_state(seed=None):
    """
    Return a numpy RandomState for the given seed. An existing RandomState is
    passed through unchanged so that callers can share one across calls.
    """
    if isinstance(seed, np.random.RandomState):
        return seed
    return np.random.RandomState(seed)


def cal_noise_power(ebn0_db, bits_per_symbol, ps=1.):
    """
    Calculate the total noise power for a given Eb/N0.

    Parameters
    ----------
    ebn0_db : float
        energy per bit over noise spectral density in dB
    bits_per_symbol : int
        number of bits per symbol
    ps : float, optional
        average symbol power of the constellation (default is 1)

    Returns
    -------
    pn : float
        total noise power, to be split equally between the two quadratures

    Raises
    ------
    ZeroDivisionError
        if bits_per_symbol is zero
    """
    if bits_per_symbol == 0:
        raise ZeroDivisionError("bits_per_symbol has to be non-zero")
    # very large Eb/N0 overflows to inf, i.e. a noise power of 0
    with np.errstate(over="ignore"):
        ebn0 = dB2lin(np.float64(ebn0_db))
    return float(ps / (ebn0 * bits_per_symbol))


def add_awgn(sig, pn, rand_state=None):
    """
    Add additive white Gaussian noise to a signal.

    Parameters
    ----------
    sig    : array_like
        complex signal input array
    pn : float
        total noise power, each quadrature gets a variance of pn/2
    rand_state : np.random.RandomState, optional
        random state to draw the noise from. A new unseeded one is used if None

    Returns
    -------
    sigout : array_like
       output signal with added noise

    """
    R = get_random_state(rand_state)
    sig = np.asarray(sig)
    noise = np.sqrt(pn / 2) * (R.randn(*sig.shape) + 1.j*R.randn(*sig.shape))
    return sig + noise.astype(sig.dtype)

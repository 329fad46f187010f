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
Bit-error-rate simulation of Gray coded QAM over an AWGN channel.
"""
import numbers
import warnings
import numpy as np

from qamber.core import constellations, montecarlo
from qamber.core.channel import get_random_state
from qamber.core.montecarlo import BLOCK_SIZE, STOPPED_BY_CANCELLATION


class BERUndefinedWarning(RuntimeWarning):
    pass


def _check_count(value, name):
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValueError("%s has to be a positive integer, got %r" % (name, value))
    if not np.isfinite(value) or value <= 0 or value != int(value):
        raise ValueError("%s has to be a positive integer, got %r" % (name, value))
    return int(value)


def _check_ebn0(EbNo):
    if isinstance(EbNo, (bool, np.bool_)) or not isinstance(EbNo, numbers.Real) or np.isnan(EbNo):
        raise ValueError("EbNo has to be a real number in dB, got %r" % (EbNo,))
    return float(EbNo)


def cal_ber(nerrs, nbits):
    """
    Calculate the bit-error rate from error and bit counts. If no bits were
    simulated the BER is undefined, in that case nan is returned and a
    BERUndefinedWarning is issued.
    """
    if nbits == 0:
        warnings.warn("No bits were simulated, the BER is undefined", BERUndefinedWarning)
        return np.nan
    return nerrs / nbits


def simulate_qam(EbNo, maxNumErrs, maxNumBits, M=4, is_stopped=None, seed=None, N=BLOCK_SIZE, verbose=False):
    """
    Simulate the bit-error rate of M-QAM over an AWGN channel.

    Blocks of N random symbols are transmitted until either maxNumErrs bit
    errors or maxNumBits bits have been accumulated, or until is_stopped()
    returns True.

    Parameters
    ----------
    EbNo : float
        energy per bit over noise spectral density in dB
    maxNumErrs : int
        number of bit errors after which to stop the simulation
    maxNumBits : int
        number of bits after which to stop the simulation
    M : int, optional
        QAM order, either 4 or 16
    is_stopped : callable, optional
        zero-argument function polled before every block, return True to cancel
    seed : int or np.random.RandomState, optional
        seed of the random number generator of this run
    N : int, optional
        number of symbols per block
    verbose : bool, optional
        also return the error count and the termination state

    Returns
    -------
    ber : float
        bit-error rate, nan if no bits were simulated
    numBits : int
        number of simulated bits
    nerrs : int, optional
        number of bit errors (only if verbose)
    state : str, optional
        montecarlo.STOPPED_BY_LIMIT or montecarlo.STOPPED_BY_CANCELLATION (only if verbose)
    """
    EbNo = _check_ebn0(EbNo)
    maxNumErrs = _check_count(maxNumErrs, "maxNumErrs")
    maxNumBits = _check_count(maxNumBits, "maxNumBits")
    N = _check_count(N, "N")
    coded_symbols, encoding = constellations.get_constellation(M)
    pn = montecarlo.noise_power_for(coded_symbols, encoding, EbNo)
    nerrs, nbits, state = montecarlo.run_monte_carlo(coded_symbols, encoding, pn, maxNumErrs, maxNumBits,
                                                     N=N, is_stopped=is_stopped,
                                                     rand_state=get_random_state(seed))
    ber = cal_ber(nerrs, nbits)
    if verbose:
        return ber, nbits, nerrs, state
    else:
        return ber, nbits


def simulate_qam1(EbNo, maxNumErrs, maxNumBits, **kwargs):
    """
    Bit-error rate of 4-QAM (QPSK) over AWGN, see simulate_qam for the parameters.
    """
    return simulate_qam(EbNo, maxNumErrs, maxNumBits, M=4, **kwargs)


def simulate_qam3(EbNo, maxNumErrs, maxNumBits, **kwargs):
    """
    Bit-error rate of 16-QAM over AWGN, see simulate_qam for the parameters.
    """
    return simulate_qam(EbNo, maxNumErrs, maxNumBits, M=16, **kwargs)


def sweep_ebn0(EbNo, maxNumErrs, maxNumBits, M=4, is_stopped=None, seed=None, N=BLOCK_SIZE):
    """
    Simulate the bit-error rate for a range of Eb/N0 values. Each point is an
    independent run with its own random state drawn from the sweep seed. The
    sweep ends at the first point that was cancelled; the remaining points are
    left at nan BER and 0 bits.

    Parameters
    ----------
    EbNo : array_like
        energy per bit over noise spectral density values in dB
    maxNumErrs, maxNumBits : int
        stopping criteria for every point
    M : int, optional
        QAM order
    is_stopped : callable, optional
        cancellation predicate shared by all points
    seed : int, optional
        seed from which the per point seeds are drawn
    N : int, optional
        number of symbols per block

    Returns
    -------
    ber : array_like
        bit-error rate for each Eb/N0 value
    nbits : array_like
        number of simulated bits for each Eb/N0 value
    """
    EbNo = np.atleast_1d(EbNo)
    ber = np.full(EbNo.shape, np.nan)
    nbits = np.zeros(EbNo.shape, dtype=np.int64)
    seeds = get_random_state(seed).randint(0, 2**31 - 1, size=EbNo.size)
    for i, ebn0 in enumerate(EbNo):
        b, n, nerrs, state = simulate_qam(float(ebn0), maxNumErrs, maxNumBits, M=M, is_stopped=is_stopped,
                                          seed=int(seeds[i]), N=N, verbose=True)
        ber[i] = b
        nbits[i] = n
        if state == STOPPED_BY_CANCELLATION:
            break
    return ber, nbits

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
Monte Carlo estimation of bit errors. Blocks of random symbols are sent through
an AWGN channel and demodulated until either enough errors or enough bits have
been accumulated, or until the caller requests cancellation.
"""

from qamber.helpers import cal_symbol_power
from qamber.core.channel import add_awgn, cal_noise_power, get_random_state
from qamber.core.demodulation import demodulate_qam

BLOCK_SIZE = 10000

RUNNING = "running"
STOPPED_BY_LIMIT = "stopped_by_limit"
STOPPED_BY_CANCELLATION = "stopped_by_cancellation"


def _never_stopped():
    return False


def simulate_block(coded_symbols, encoding, pn, N=BLOCK_SIZE, rand_state=None):
    """
    Simulate the transmission of one block of random symbols.

    Parameters
    ----------
    coded_symbols : array_like
        symbol alphabet
    encoding : array_like
        (M, Nbits) boolean bit labels of the alphabet
    pn : float
        total noise power
    N : int, optional
        number of symbols in the block
    rand_state : np.random.RandomState, optional
        random state for symbol and noise generation

    Returns
    -------
    nerrors : int
        number of bit errors in the block
    nbits : int
        number of bits in the block, N*log2(M)
    """
    R = get_random_state(rand_state)
    M = coded_symbols.shape[0]
    idx_tx = R.randint(0, M, size=N)
    sig_tx = coded_symbols[idx_tx]
    sig_rx = add_awgn(sig_tx, pn, R)
    _, nerrors = demodulate_qam(sig_rx, coded_symbols, encoding, idx_tx)
    return nerrors, N * encoding.shape[1]


def run_monte_carlo(coded_symbols, encoding, pn, max_errs, max_bits, N=BLOCK_SIZE,
                    is_stopped=None, rand_state=None, callback=None):
    """
    Accumulate bit errors over blocks until a stopping criterion is met.

    Before every block the cancellation predicate is polled; if it returns True
    the loop ends without simulating another block. After every block the loop
    ends once the number of errors reaches max_errs or the number of bits
    reaches max_bits.

    Parameters
    ----------
    coded_symbols : array_like
        symbol alphabet
    encoding : array_like
        bit labels of the alphabet
    pn : float
        total noise power
    max_errs : int
        number of bit errors after which to stop
    max_bits : int
        number of bits after which to stop
    N : int, optional
        number of symbols per block
    is_stopped : callable, optional
        zero-argument function returning True if the simulation should be
        cancelled
    rand_state : np.random.RandomState, optional
        random state used for all blocks
    callback : callable, optional
        called as callback(nerrs, nbits) after every block

    Returns
    -------
    nerrs : int
        total number of bit errors
    nbits : int
        total number of simulated bits
    state : str
        either STOPPED_BY_LIMIT or STOPPED_BY_CANCELLATION
    """
    if is_stopped is None:
        is_stopped = _never_stopped
    R = get_random_state(rand_state)
    nerrs = 0
    nbits = 0
    state = RUNNING
    while state == RUNNING:
        if is_stopped():
            state = STOPPED_BY_CANCELLATION
            break
        blk_errs, blk_bits = simulate_block(coded_symbols, encoding, pn, N=N, rand_state=R)
        nerrs += blk_errs
        nbits += blk_bits
        if callback is not None:
            callback(nerrs, nbits)
        if nerrs >= max_errs or nbits >= max_bits:
            state = STOPPED_BY_LIMIT
    return nerrs, nbits, state


def noise_power_for(coded_symbols, encoding, ebn0_db):
    """
    Noise power for a given Eb/N0 in dB, using the average power of the
    alphabet and its number of bits per symbol.
    """
    return cal_noise_power(ebn0_db, encoding.shape[1], cal_symbol_power(coded_symbols))

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
Minimum distance (hard decision) demodulation and bit error counting.
"""
import numpy as np

from qamber.helpers import cabssquared

# maximum number of elements of the distance matrix computed in one go
NMAX = 2**24


def _decision_idx(signal, symbols):
    d = cabssquared(signal[:, np.newaxis] - symbols[np.newaxis, :])
    # argmin returns the first occurrence, i.e. ties go to the lowest index
    idx = np.argmin(d, axis=1)
    return idx, d[np.arange(idx.size), idx]


def make_decision(signal, symbols):
    """
    Apply decision operator to input signal. Each sample is decided onto the
    symbol with the smallest Euclidean distance, equidistant samples are
    decided onto the symbol with the lowest index.

    Parameters
    ----------
    signal : array_like
        1D input signal to decide on
    symbols : array_like
        symbol alphabet

    Returns
    -------
    det_symbs : array_like
        decided symbols
    dist : array_like
        squared distance between each sample and its decided symbol
    idx : array_like
        index of the decided symbols in the alphabet
    """
    signal = np.atleast_1d(np.asarray(signal))
    symbols = np.asarray(symbols)
    L = signal.shape[0]
    M = symbols.shape[0]
    idx = np.zeros(L, dtype=np.intp)
    dist = np.zeros(L, dtype=signal.real.dtype)
    Nmax = max(NMAX // M, 1)
    for i in range(0, L, Nmax):
        idx[i:i+Nmax], dist[i:i+Nmax] = _decision_idx(signal[i:i+Nmax], symbols)
    return symbols[idx], dist, idx


def hamming_distance(a, b):
    """
    Number of differing bit positions between two bit labels. If a and b are
    2D arrays the distance is calculated along the last axis.
    """
    return np.count_nonzero(np.asarray(a) != np.asarray(b), axis=-1)


def count_bit_errors(idx_rx, idx_tx, encoding):
    """
    Count bit errors between detected and transmitted symbol indices.

    Parameters
    ----------
    idx_rx : array_like
        indices of the detected symbols
    idx_tx : array_like
        indices of the transmitted symbols
    encoding : array_like
        (M, Nbits) boolean bit labels of the alphabet

    Returns
    -------
    nerrors : int
        sum of the Hamming distances between detected and transmitted labels
    """
    idx_rx = np.asarray(idx_rx)
    idx_tx = np.asarray(idx_tx)
    assert idx_rx.shape == idx_tx.shape, "detected and transmitted indices need to have the same shape"
    # only symbol errors can contribute bit errors
    err = idx_rx != idx_tx
    return int(hamming_distance(encoding[idx_rx[err]], encoding[idx_tx[err]]).sum())


def demodulate_qam(signal_rx, symbols, encoding, idx_tx):
    """
    Minimum distance detection of a received block and bit error count against
    the transmitted symbol indices.

    Parameters
    ----------
    signal_rx : array_like
        received complex samples
    symbols : array_like
        symbol alphabet
    encoding : array_like
        bit labels of the alphabet
    idx_tx : array_like
        indices of the transmitted symbols

    Returns
    -------
    idx_rx : array_like
        indices of the detected symbols
    nerrors : int
        number of bit errors in the block
    """
    _, _, idx_rx = make_decision(signal_rx, symbols)
    return idx_rx, count_bit_errors(idx_rx, idx_tx, encoding)

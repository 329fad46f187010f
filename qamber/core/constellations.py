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
Fixed Gray coded constellation tables for 4-QAM (QPSK) and 16-QAM.

Every table is an ordered array of complex symbols together with an encoding
array of shape (M, log2(M)) of booleans holding the bit label of each symbol.
The symbol index is the row index into the encoding.
"""
import numpy as np

from qamber.helpers import normalise_power, cabssquared

SUPPORTED_ORDERS = (4, 16)

# label order follows the symbol order below
_QPSK_SYMBOLS = np.array([1+1j, -1+1j, -1-1j, 1-1j])
_QPSK_BITS = ["00", "01", "11", "10"]

# in-phase level -3,-1,1,3 -> first bit pair 00,01,11,10
# quadrature level 3,1,-1,-3 -> second bit pair 00,01,11,10
_QAM16_SYMBOLS = np.array([-3+3j, -1+3j, 3+3j, 1+3j,
                           -3+1j, -1+1j, 3+1j, 1+1j,
                           -3-1j, -1-1j, 3-1j, 1-1j,
                           -3-3j, -1-3j, 3-3j, 1-3j])
_QAM16_BITS = ["0000", "0100", "1000", "1100",
               "0001", "0101", "1001", "1101",
               "0011", "0111", "1011", "1111",
               "0010", "0110", "1010", "1110"]

_TABLES = {4: (_QPSK_SYMBOLS, _QPSK_BITS), 16: (_QAM16_SYMBOLS, _QAM16_BITS)}
_CACHE = {}


def bits_per_symbol(M):
    """
    Number of bits carried by a symbol of an M-ary constellation
    """
    return int(np.log2(M))


def labels_to_encoding(labels):
    """
    Convert a list of bit label strings (e.g. ["00", "01"]) into a boolean
    encoding array of shape (len(labels), Nbits).
    """
    Nbits = len(labels[0])
    encoding = np.zeros((len(labels), Nbits), dtype=bool)
    for i, lbl in enumerate(labels):
        assert len(lbl) == Nbits, "all bit labels need to have the same length"
        encoding[i] = [b == "1" for b in lbl]
    return encoding


def get_constellation(M, dtype=np.complex128):
    """
    Return the power normalised symbol alphabet and the bit encoding for a
    supported QAM order.

    Parameters
    ----------
    M : int
        QAM order, either 4 or 16
    dtype : numpy dtype, optional
        complex dtype of the returned symbols

    Returns
    -------
    coded_symbols : array_like
        1D array of the M symbols, mean power 1 (read-only)
    encoding : array_like
        (M, log2(M)) boolean array of the bit labels (read-only)

    Raises
    ------
    ValueError
        if M is not one of the supported orders
    """
    if M not in _TABLES:
        raise ValueError("QAM order %r is not supported, has to be one of %s" % (M, SUPPORTED_ORDERS))
    key = (M, np.dtype(dtype))
    if key not in _CACHE:
        symbols, labels = _TABLES[M]
        coded_symbols = normalise_power(symbols).astype(dtype)
        encoding = labels_to_encoding(labels)
        coded_symbols.flags.writeable = False
        encoding.flags.writeable = False
        _CACHE[key] = (coded_symbols, encoding)
    return _CACHE[key]


def is_gray_coded(symbols, encoding):
    """
    Check that each symbol differs in exactly one bit from every one of its
    nearest neighbours.

    Parameters
    ----------
    symbols : array_like
        symbol alphabet
    encoding : array_like
        boolean bit labels with one row per symbol

    Returns
    -------
    out : bool
        True if the mapping is Gray coded
    """
    symbols = np.asarray(symbols)
    d = cabssquared(symbols[:, np.newaxis] - symbols[np.newaxis, :])
    np.fill_diagonal(d, np.inf)
    dmin = d.min()
    for i, j in zip(*np.nonzero(np.isclose(d, dmin))):
        if np.count_nonzero(encoding[i] != encoding[j]) != 1:
            return False
    return True

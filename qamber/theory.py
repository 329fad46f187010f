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

import numpy as np
from scipy.special import erfc

from qamber.helpers import dB2lin


def q_function(x):
    """The Q function is the tail probability of the standard normal distribution see _[1] for a definition and its relation to the erfc.

    References
    ----------
    ...[1] https://en.wikipedia.org/wiki/Q-function
    """
    return 0.5*erfc(x/np.sqrt(2))


def ser_vs_es_over_n0_qam(snr, M):
    """Calculate the symbol error rate (SER) of an M-QAM signal as a function
    of Es/N0 (Symbol energy over noise energy, given in linear units)"""
    return 2*(1-1/np.sqrt(M))*erfc(np.sqrt(3*snr/(2*(M-1)))) -\
            (1-2/np.sqrt(M)+1/M)*erfc(np.sqrt(3*snr/(2*(M-1))))**2


def ber_vs_es_over_n0_qam(snr, M):
    """
    Bit-error-rate vs signal to noise ratio after formula in _[1]. This is the
    nearest neighbour approximation for Gray coded square QAM, for M=4 it is
    exact.

    Parameters
    ----------

    snr   : array_like
        Signal to noise ratio (Es/N0) in linear units

    M     : integer
        Order of M-QAM

    Returns
    -------

    ber   : array_like
        theoretical bit-error-rate

    References
    ----------
    ...[1] Shafik, R. (2006). On the extended relationships among EVM, BER and SNR as performance metrics. In Conference on Electrical and Computer Engineering (p. 408). Retrieved from http://ieeexplore.ieee.org/xpls/abs_all.jsp?arnumber=4178493
    """
    L = np.sqrt(M)
    ber = 2 * (1-1/L) / np.log2(L) * q_function(np.sqrt(3 * np.log2(L) / (L ** 2 - 1) * (2 * snr / np.log2(M))))
    return ber


def ber_vs_ebn0_qam(ebn0, M):
    """
    Theoretical bit-error-rate of Gray coded square M-QAM as a function of
    Eb/N0 in linear units.
    """
    return ber_vs_es_over_n0_qam(ebn0 * np.log2(M), M)


def ber_vs_ebn0_db_qam(ebn0_db, M):
    """
    Theoretical bit-error-rate of Gray coded square M-QAM as a function of
    Eb/N0 in dB.
    """
    return ber_vs_ebn0_qam(dB2lin(np.asarray(ebn0_db, dtype=float)), M)

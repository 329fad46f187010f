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
Convenient helper functions
"""
import numpy as np


def cabssquared(x):
    """Calculate the absolute squared of a complex number"""
    return x.real**2 + x.imag**2


def dB2lin(x):
    """
    Convert input from dB(m) units to linear units
    """
    return 10**(x/10)


def lin2dB(x):
    """
    Convert input from linear units to dB(m)
    """
    return 10*np.log10(x)


def cal_symbol_power(symbols):
    """
    Average power of a symbol alphabet, i.e. mean(|symbols|^2)
    """
    return np.mean(cabssquared(np.asarray(symbols)))


def normalise_power(symbols):
    """
    Scale a symbol alphabet to an average power of 1 without centering it.
    """
    symbols = np.asarray(symbols)
    return symbols / np.sqrt(cal_symbol_power(symbols))

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
Monte Carlo bit-error-rate simulation of Gray coded QPSK and 16-QAM over an
AWGN channel.
"""
from qamber.simulation import simulate_qam, simulate_qam1, simulate_qam3, sweep_ebn0, BERUndefinedWarning

__version__ = "0.1"

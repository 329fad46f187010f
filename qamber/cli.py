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
Command line interface, prints the simulated BER and the number of bits.
"""
import argparse

from qamber import simulation
from qamber.core.constellations import SUPPORTED_ORDERS
from qamber.core.montecarlo import BLOCK_SIZE


def build_parser():
    parser = argparse.ArgumentParser(prog="qamber-sim",
                                     description="Monte Carlo BER simulation of QAM over an AWGN channel")
    parser.add_argument("EbNo", type=float, help="Eb/N0 in dB")
    parser.add_argument("maxNumErrs", type=int, help="number of bit errors after which to stop")
    parser.add_argument("maxNumBits", type=float,
                        help="number of bits after which to stop (e.g. 1e6)")
    parser.add_argument("-M", type=int, default=4, choices=SUPPORTED_ORDERS, help="QAM order")
    parser.add_argument("--seed", type=int, default=None, help="seed of the random number generator")
    parser.add_argument("--block-size", type=int, default=BLOCK_SIZE, help="number of symbols per block")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        ber, nbits = simulation.simulate_qam(args.EbNo, args.maxNumErrs, args.maxNumBits, M=args.M,
                                             seed=args.seed, N=args.block_size)
    except ValueError as e:
        parser.error(str(e))
    print("%g %d" % (ber, nbits))
    return 0

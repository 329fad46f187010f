import numpy as np
from qamber import simulation, theory

ebn0 = np.arange(0, 11, 1)
maxerrs = 200
maxbits = 10**7

for M in [4, 16]:
    ber, nbits = simulation.sweep_ebn0(ebn0, maxerrs, maxbits, M=M, seed=1)
    ber_t = theory.ber_vs_ebn0_db_qam(ebn0, M)
    print("%d-QAM"%M)
    print("EbN0[dB]   BER sim     BER theory  bits")
    for e, b, bt, n in zip(ebn0, ber, ber_t, nbits):
        print("%5.1f      %.3e   %.3e   %d"%(e, b, bt, n))

from setuptools import setup, find_packages

setup(
    name='qamber',

    # Versions should comply with PEP440.  For a discussion on single-sourcing
    # the version across setup.py and the project code, see
    # https://packaging.python.org/en/latest/single_source_version.html
    version='0.1',

    description='Monte Carlo bit-error-rate simulation of QPSK and 16-QAM over AWGN',
    long_description=None,

    # The project's main homepage.
    url=None,

    # Author details
    author='The qamber developers',

    # Choose your license
    license='GPLv3',

    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        # How mature is this project? Common values are
        #   3 - Alpha
        #   4 - Beta
        #   5 - Production/Stable
        'Development Status :: 3 - Alpha',

        # Indicate who your project is intended for
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering',

        # Pick your license as you wish (should match "license" above)
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',

        'Programming Language :: Python :: 3',
    ],

    # What does your project relate to?
    keywords='DSP science BER QAM',

    packages=find_packages(exclude=['contrib', 'docs', 'test', 'Scripts']),

    # List run-time dependencies here.  These will be installed by pip when
    # your project is installed.
    install_requires=['numpy', 'scipy'],
    # $ pip install -e .[test]
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'qamber-sim=qamber.cli:main',
        ],
    },
)

#!/usr/bin/env python3
"""
.. module:: setup
   :platform: posix
   :synopsis: Build the servokit package.

.. moduleauthor:: Alexander Sowitzki <dev@eqrx.net>
"""

import setuptools

setuptools.setup(
    version="0.1.0",
    author="Alexander Sowitzki",
    author_email="dev@eqrx.net",
    name="servokit",
    keywords="pca9685 pwm i2c servo driver hardware",
    description="Register level driver for PCA9685 PWM controllers",
    packages=setuptools.find_packages(exclude=["tests"]),
    python_requires=">=3.7",
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: '
        'GNU Affero General Public License v3 or later (AGPLv3+)',
        'Natural Language :: English',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: Implementation :: CPython',
        'Topic :: Software Development :: Embedded Systems',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: System :: Hardware :: Hardware Drivers'
    ],
    install_requires=["PyYAML"],
    tests_require=['pytest', 'pylint', 'pytest-pylint'],
    extras_require={
        "build": ["sphinx", "pytest-runner"],
        "test": ['pytest', 'pylint', 'pytest-pylint']
    },
    entry_points={
        "console_scripts": ['servokit=servokit.shell:main']
    }
)

import sys
major, minor = sys.version_info[:2]
if not (major == 3 and minor >= 10):
    print("Python >=3.10 is required to use this module.")
    sys.exit(1)

import os.path
import re

from setuptools import setup

setup_dir = os.path.split(os.path.abspath(__file__))[0]
with open(os.path.join(setup_dir, 'README.rst')) as f:
    DOCUMENTATION = f.read()

init_path = os.path.join(setup_dir, 'xoshiro', '__init__.py')
with open(init_path) as f:
    version_match = re.search(r"^VERSION = \((.*)\)$", f.read(), re.MULTILINE)
VERSION = '.'.join(x.strip() for x in version_match.group(1).split(','))

dependencies = ['numpy>=2']

setup(
    name='xoshiro',
    packages=['xoshiro'],
    provides=['xoshiro'],
    python_requires='>=3.10',
    install_requires=dependencies,
    extras_require={'test': ['pytest']},
    version=VERSION,
    description='Pseudo-random number generators of the xoshiro/xoroshiro family',
    long_description=DOCUMENTATION,
    long_description_content_type='text/x-rst',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Mathematics'
    ]
)

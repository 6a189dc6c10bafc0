import os
from os import path

from setuptools import find_packages
from setuptools import setup

MYDIR = path.abspath(os.path.dirname(__file__))


def load_version():
    scope = {}
    with open(path.join(MYDIR, 'ncdutil', 'version.py'), encoding='utf-8') as f:
        exec(f.read(), scope)
    return scope['__version__']


def load_description():
    with open(path.join(MYDIR, 'README.rst'), encoding='utf-8') as f:
        return f.read()


setup(
    name='ncdutil',
    version=load_version(),
    description=(
        'Mode list, path segment, and escaping utilities for dataset '
        'dispatch URLs'
    ),
    long_description=load_description(),
    long_description_content_type='text/x-rst',
    license='Apache-2.0',
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering',
        'Topic :: Software Development :: Libraries',
    ],
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=[],
    extras_require={
        'test': ['pytest'],
    },
)

#!/usr/bin/env python
"""
Setup.py distribution file for ansireflow.
"""
# std imports
import os
import codecs

# 3rd party
import setuptools


def _get_here(fname):
    return os.path.join(os.path.dirname(__file__), fname)


def _get_version(fname, key='package'):
    import json
    with open(fname, 'r') as fin:
        return json.load(fin)[key]


def main():
    """Setup.py entry point."""
    setuptools.setup(
        name='ansireflow',
        version=_get_version(
            _get_here(os.path.join('ansireflow', 'version.json'))),
        description=(
            "Measure, pad and truncate text containing terminal escape sequences"),
        long_description=codecs.open(
            _get_here('README.rst'), 'rb', 'utf8').read(),
        long_description_content_type='text/x-rst',
        license='MIT',
        packages=['ansireflow'],
        package_data={
            'ansireflow': ['*.json'],
            '': ['*.rst'],
        },
        python_requires='>=3.8',
        extras_require={
            'test': ['pytest'],
            'benchmark': ['pytest', 'pytest-codspeed'],
        },
        zip_safe=True,
        classifiers=[
            'Intended Audience :: Developers',
            'Natural Language :: English',
            'Development Status :: 3 - Alpha',
            'Environment :: Console',
            'License :: OSI Approved :: MIT License',
            'Operating System :: POSIX',
            'Programming Language :: Python :: 3',
            'Topic :: Software Development :: Libraries',
            'Topic :: Terminals'
        ],
        keywords=[
            'ansi',
            'console',
            'escape',
            'padding',
            'sgr',
            'terminal',
            'truncate',
            'xterm',
        ],
    )


if __name__ == '__main__':
    main()

import os

from setuptools import find_packages
from setuptools import setup

packages = find_packages('src')

# grab __version__, __author__, etc.
exec(open('src/scanpath/version.py').read())


def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname), encoding='utf-8').read()


try:
    long_description = read('README.rst')
except OSError:
    long_description = read('README.md')

setup(
    name=__title__,
    version=__version__,
    description=__description__,
    long_description=long_description,
    long_description_content_type='text/markdown',

    author=__author__,
    author_email=__author_email__,
    license=__license__,
    url=__url__,

    classifiers=[
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Operating System :: OS Independent',
        'Topic :: Scientific/Engineering :: Physics',
        'Topic :: Software Development :: Libraries',
    ],

    packages=packages,
    package_dir={'': 'src'},
    package_data={'scanpath.config': ['*.yaml']},
    python_requires='>=3.9',

    install_requires=['numpy>=1.17.3',
                      'matplotlib>=3.1.2',
                      'PyYAML>=5.3',
                      'typing_extensions>=4.0.0',
                      ],

    extras_require={
        'test': ['pytest>=6.0'],
    },

    include_package_data=True,
)

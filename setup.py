# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/18 10:10'

Usage:

"""

import os
from codecs import open

from setuptools import setup

here = os.path.abspath(os.path.dirname(__file__))

packages = ['rendezvous_hash', 'rendezvous_hash.utils']
file_data = [
]

package_data = {
}

requires = [
    'Flask>=2.0',
]

test_requires = [
    'pytest>=6.0',
]

about = {}
with open(os.path.join(here, 'rendezvous_hash', '__version__.py'), 'r', 'utf-8') as f:
    exec(f.read(), about)

with open(os.path.join(here, 'README.md'), 'r', 'utf-8') as f:
    readme = f.read()

setup(
    name=about['__title__'],
    version=about['__version__'],
    description=about['__description__'],
    long_description=readme,
    long_description_content_type='text/markdown',
    author=about['__author__'],
    author_email=about['__author_email__'],
    url=about['__url__'],
    license=about['__license__'],
    packages=packages,
    data_files=file_data,
    include_package_data=True,
    package_data=package_data,
    python_requires=">=3.7",
    install_requires=requires,
    extras_require={
        'test': test_requires,
    },
    zip_safe=False,
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy'
    ],
)

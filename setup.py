# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from setuptools import setup, find_packages

VERSION = (1, 0, 0)
__version__ = '.'.join(map(str, VERSION[0:3]))
__description__ = '''Authenticating forward HTTP proxy server with
    Basic proxy authentication, CONNECT tunneling and an access log.'''
__author__ = 'Abhinav Singh'
__author_email__ = 'mailsforabhinav@gmail.com'
__homepage__ = 'https://github.com/abhinavsingh/proxy.py'
__download_url__ = '%s/archive/master.zip' % __homepage__
__license__ = 'BSD'


def _requirements(path: str) -> list:
    with open(path, 'r', encoding='utf-8') as f:
        return [
            line.strip() for line in f
            if line.strip() and not line.startswith('#')
        ]


setup(
    name='authproxy',
    version=__version__,
    author=__author__,
    author_email=__author_email__,
    url=__homepage__,
    description=__description__,
    long_description=open(
        'README.md', 'r', encoding='utf-8').read().strip(),
    long_description_content_type='text/markdown',
    download_url=__download_url__,
    license=__license__,
    python_requires='>=3.7',
    zip_safe=False,
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={'authproxy': ['py.typed']},
    install_requires=_requirements('requirements.txt'),
    extras_require={
        'testing': _requirements('requirements-testing.txt'),
    },
    entry_points={
        'console_scripts': [
            'authproxy = authproxy:entry_point'
        ]
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Environment :: No Input/Output (Daemon)',
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: BSD License',
        'Operating System :: POSIX',
        'Operating System :: POSIX :: Linux',
        'Operating System :: MacOS :: MacOS X',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3',
        'Topic :: Internet',
        'Topic :: Internet :: Proxy Servers',
        'Topic :: System :: Networking',
        'Typing :: Typed',
    ],
    keywords=(
        'http, proxy, http proxy server, proxy server, basic auth,'
        'connect tunnel, Python3'
    )
)

from os import path

from setuptools import find_packages, setup

wdir = path.abspath(path.dirname(__file__))

try:
    with open(path.join(wdir, 'README.md'), encoding='utf-8') as f:
        long_description = f.read()
except FileNotFoundError:
    long_description = ''

install_requires = [
    'PyJWT>=2.8,<3',
]

dev_install_requires = [
    'autopep8>=2.0',
    'bandit>=1.7',
    'flake8-bugbear>=23.0',
    'flake8-datetimez>=20.10.0',
    'flake8-isort>=6.0',
    'flake8-logging-format>=0.9',
    'flake8-quotes>=3.3',
    'flake8>=6.0',
    'isort>=5.12',
    'mypy>=1.0',
    'pytest-cov>=4.0',
    'pytest>=7.0',
]


if __name__ in ('__main__', 'builtins'):
    setup(
        name='ghost-admin-token',

        description='Generate short-lived Ghost Admin API tokens from an id:secret key',
        long_description=long_description,
        long_description_content_type='text/markdown',

        license='MIT License',

        classifiers=[
            'Development Status :: 4 - Beta',
            'Programming Language :: Python :: 3',
            'Programming Language :: Python :: Implementation :: CPython',
            'Operating System :: POSIX',
            'Operating System :: MacOS :: MacOS X'
        ],

        packages=find_packages(exclude=['tests', 'tests.*']),

        python_requires='>=3.8',

        use_scm_version={'fallback_version': '0.1.0'},
        setup_requires=['setuptools-scm'],

        install_requires=install_requires,
        extras_require={'dev': dev_install_requires},

        entry_points={
            'console_scripts': [
                'ghost-admin-token = ghost_admin_token.__main__:main',
            ],
        },

        package_data={},
    )

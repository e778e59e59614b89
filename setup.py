from glob import glob
from setuptools import setup


TESTS_REQUIRE = [
    'pytest',
    'pytest-cov',
    'coverage',
    'flake8',
    'bandit',
    'mypy',
    'safety',
]


setup(
    name='qcalc',
    version='0.1.0',
    description='Arbitrary-precision keypad calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
        'mpmath',
    ],
    packages=['qcalc'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    tests_require=TESTS_REQUIRE,
    extras_require={
        'test': TESTS_REQUIRE,
    },
    scripts=glob('bin/*'),
    license='ISC',
)

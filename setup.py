import os

from setuptools import setup, find_packages

os.umask(0o022)

setup(
    name='numerals',
    version='1.0.0',
    description="Strict conversions between arabic numbers and roman numerals",
    license='CC0',
    packages=find_packages(exclude=['tests']),
    long_description="Converts arabic numbers from 1 to 3999 into roman numerals and back, "
                     "rejecting malformed numerals.",
    install_requires=[],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'numerals=numerals.__main__:main',
        ],
    },
    keywords='roman numerals numbers conversion',
    include_package_data=True,
    zip_safe=False,
)

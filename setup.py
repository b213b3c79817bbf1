from setuptools import setup, find_packages

__version__ = '0.1.0'

requirements = [
    'coloredlogs',
]

test_requirements = [
    'pytest',
]

setup(
    name='nftregistry',
    version=__version__,
    description='In-memory non-fungible token ownership registry with role based access control.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=requirements,
    extras_require={
        'test': test_requirements,
    },
    python_requires='>=3.7',
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
    zip_safe=True,
)

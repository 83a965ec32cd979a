from setuptools import setup, find_packages

__version__ = '0.1.0'

requirements = [
    'coloredlogs',
    'pymongo',
    'requests',
    'sanic',
    'sanic-cors',
]

test_requirements = [
    'pytest',
    'sanic-testing',
]

setup(
    name='nftledger',
    version=__version__,
    description='Non-fungible token ownership ledger with delegated transfer approvals.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=requirements,
    extras_require={
        'test': test_requirements,
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.8',
    zip_safe=True,
    include_package_data=True,
)

# setup.py
from setuptools import setup, find_packages

setup(
    name="nametree",
    version="0.1.0",
    description="Namespace trees with aliases, soft links and closest common parent queries",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'nametree=nametree.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)

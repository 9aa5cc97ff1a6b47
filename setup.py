from setuptools import setup, find_packages

setup(
    name="connect4_core",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy",
        "gymnasium",  # ConnectFourEnv
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "connect4=connect4_core.interfaces.cli:main",
        ],
    },
)

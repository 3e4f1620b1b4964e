from setuptools import setup, find_packages

setup(
    name="modcrypto_package",
    version="0.1.0",
    description="Modular arithmetic, prime generation and elliptic curve cryptography over arbitrary curves",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "tx-engine",
    ],
    extras_require={
        "test": [
            "pytest",
            "cryptography",
            "sympy",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
)

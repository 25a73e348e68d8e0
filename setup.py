from setuptools import setup, find_packages

setup(
    name="gentzen",
    version="0.1.0",
    description="Propositional tautology checker based on the Gentzen sequent calculus",
    author="gentzen contributors",
    author_email="",

    # Find packages in the src/ directory
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"gentzen": ["configs/*.yaml"]},

    zip_safe=False,
    python_requires=">=3.8",

    install_requires=[
        "pyyaml",
        "tqdm",
    ],

    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "mypy",
            "types-PyYAML",
            "ruff",
        ],
    },

    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Education",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: MIT License",
    ],

    entry_points={
        "console_scripts": [
            "gentzen=gentzen.cli.prove:main",
        ],
    },
)

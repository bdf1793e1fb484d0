from setuptools import setup, find_packages


setup(
    name="paxmark",
    version="0.1",
    packages=find_packages(include=["paxmark", "paxmark.*"]),
    description="Toggle PaX security-feature marks stored in the user.pax.flags extended attribute.",
    author="vercingetorx",
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "paxmark=paxmark.cli:main",
        ]
    },
)

from setuptools import setup, find_packages

setup(
    name="ygo_hand_sim",
    version="0.1.0",
    packages=find_packages(include=["ygo_hand_sim", "ygo_hand_sim.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "ygo-hand-sim=ygo_hand_sim.cli:main",
        ]
    },
)

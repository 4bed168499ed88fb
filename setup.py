from setuptools import setup, find_packages

setup(
    name="terminal_minefield",
    version="0.1",
    packages=find_packages(exclude=["tests"]),
    package_data={
        "minefield_cli": ["game_config.yaml"]
    },
    install_requires=[
        "pyyaml",
        "numpy"
    ],
    entry_points={
        "console_scripts": [
            "minesweeper=minefield_cli.cli:main"
        ]
    },
)

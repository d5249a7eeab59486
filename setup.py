from setuptools import setup, find_packages

setup(
    name="campus-coffee-osm",
    version="0.1.0",
    packages=find_packages(include=["core", "core.*", "campuscoffee", "campuscoffee.*", "cli", "cli.*"]),
    install_requires=[
        "lxml",
        "pyyaml",
        "requests",
        "click",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "campuscoffee-osm=cli.run_osm_import:run_osm_import",
        ],
    },
    python_requires=">=3.9",
)

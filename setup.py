"""
Installation setup for magicdb
"""
import configparser
import pathlib

import setuptools

# Establish project directory
project_root: pathlib.Path = pathlib.Path(__file__).resolve().parent

# Read config details to determine version-ing
config_file = project_root.joinpath("magicdb/resources/magicdb.properties")
config = configparser.ConfigParser()
if config_file.is_file():
    config.read(str(config_file))

setuptools.setup(
    name="magicdb",
    version=config.get("MagicDB", "version", fallback="1.0.0+fallback"),
    description="Typed loader for MTGJSON card catalogs",
    long_description=project_root.joinpath("README.md").open(encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python",
        "Topic :: Games/Entertainment",
    ],
    keywords=[
        "Card Games",
        "Collectible",
        "JSON",
        "MTG",
        "MTGJSON",
        "Trading Cards",
        "Magic: The Gathering",
    ],
    python_requires=">=3.10",
    packages=setuptools.find_packages(include=["magicdb", "magicdb.*"]),
    package_data={"magicdb": ["resources/*.properties"]},
    install_requires=project_root.joinpath("requirements.txt")
    .open(encoding="utf-8")
    .readlines()
    if project_root.joinpath("requirements.txt").is_file()
    else [],  # Use the requirements file, if able
    extras_require={"test": ["pytest>=7.0"]},
    entry_points={"console_scripts": ["magicdb=magicdb.__main__:main"]},
)

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pinyinbook"
version = "0.1.0"
description = "A small address book that sorts and indexes contacts by pinyin initial"
requires-python = ">=3.10"
dependencies = []
keywords = ["address book", "contacts", "pinyin", "json"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Email :: Address Book",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pinyinbook = "pinyinbook.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pinyinbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

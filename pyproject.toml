[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "warungcli"
version = "0.1.0"
description = "A terminal food-ordering menu with categories, search, cart and checkout"
requires-python = ">=3.10"
dependencies = []
keywords = ["point-of-sale", "menu", "food", "cart", "terminal", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
warungcli = "warungcli.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["warungcli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

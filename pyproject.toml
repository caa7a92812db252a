[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mk1tools"
version = "0.1.0"
description = "TZX/CDT tape block builders and engine logic helpers for an Amstrad CPC platform game"
requires-python = ">=3.10"
dependencies = []
keywords = ["amstrad", "cpc", "cdt", "tzx", "tape", "retro", "platformer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mk1tools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "id3kit"
version = "0.1.0"
description = "Read, edit and write ID3v2.3 and ID3v2.4 tags in MP3 files"
requires-python = ">=3.10"
dependencies = []
keywords = ["id3", "id3v2", "mp3", "tags", "metadata", "audio"]
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
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["id3kit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

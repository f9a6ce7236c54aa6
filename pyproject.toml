[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fxmp3"
version = "0.1.0"
description = "Fixed-point MPEG audio layer III decoding building blocks in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["mp3", "mpeg", "audio", "fixed-point", "huffman", "dequantization", "polyphase"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["fxmp3"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

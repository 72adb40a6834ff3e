[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gdrivecore"
version = "0.2.0"
description = "Building blocks for a Google Drive client: file system interfaces, hashing, range options, pacing, directory caching and token storage"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = [
    "google-drive",
    "cloud-storage",
    "filesystem",
    "pacer",
    "dircache",
    "oauth",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gdrivecore"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

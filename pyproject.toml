[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flagprov"
version = "0.1.0"
description = "Feature flag providers: environment-variable flags, flagd options and a TTL-aware evaluation cache"
requires-python = ">=3.10"
dependencies = []
keywords = ["feature-flags", "feature-toggles", "flagd", "openfeature", "cache", "lru"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["flagprov"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

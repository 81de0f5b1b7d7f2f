[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "valin"
version = "0.23.0"
description = "Building blocks of a code editor's state: tabs and panels, a UTF-16 indexed text buffer with undo, commands, shortcuts, TOML settings and a file explorer tree"
requires-python = ">=3.11"
keywords = ["editor", "text-editor", "tabs", "panels", "undo", "file-explorer", "utf-16"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
    "Typing :: Typed",
]
dependencies = [
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["valin"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bankcli"
version = "0.1.0"
description = "A console bank: clients, deposits, withdrawals and users with permissions, kept in plain text files."
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "console", "clients", "accounts", "users", "permissions"]
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
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bankcli = "bankcli.menus:main"

[tool.hatch.build.targets.wheel]
packages = ["bankcli"]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marketdesk"
version = "0.1.0"
description = "A small console marketplace with clients, businesses, admins, carts, orders and cheques kept in plain text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["marketplace", "shop", "cart", "orders", "cheques", "point-of-sale", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
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
marketdesk = "marketdesk.shop:main"

[tool.hatch.build.targets.wheel]
packages = ["marketdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algotasks"
version = "0.1.0"
description = "Classic algorithm and data-structure tasks: balanced trees, hashing, heaps, sorting, order statistics and more"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "aa-tree",
    "avl-tree",
    "b-tree",
    "hash-table",
    "heap",
    "radix-sort",
    "minimum-spanning-tree",
    "order-statistics",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
algotasks-aatree = "algotasks.aatree:main"
algotasks-battle = "algotasks.battle:main"
algotasks-crossings = "algotasks.crossings:main"
algotasks-partitions = "algotasks.partitions:main"
algotasks-hashset = "algotasks.hashset:main"
algotasks-kahan = "algotasks.kahan:main"
algotasks-radix = "algotasks.radix:main"
algotasks-mst = "algotasks.mst:main"
algotasks-btree = "algotasks.btree:main"
algotasks-minmax = "algotasks.minmax:main"
algotasks-priority = "algotasks.priority:main"
algotasks-quickselect = "algotasks.quickselect:main"
algotasks-order-statistics = "algotasks.order_statistics:main"

[tool.hatch.build.targets.wheel]
packages = ["algotasks"]

[tool.pytest.ini_options]
addopts = "-ra"

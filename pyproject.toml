[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dslists"
version = "0.1.0"
description = "Singly, doubly and circular linked lists with small demos: polynomials and a student roster"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "data structures", "polynomial", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dslists-circular = "dslists.circular:main"
dslists-doubly = "dslists.doubly:main"
dslists-polynomial = "dslists.polynomial:main"
dslists-students = "dslists.students:main"

[tool.hatch.build.targets.wheel]
packages = ["dslists"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

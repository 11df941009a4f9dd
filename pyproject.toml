[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternbook"
version = "0.1.0"
description = "Small, runnable examples of classic object-oriented design patterns."
requires-python = ">=3.10"
dependencies = []
keywords = ["design patterns", "education", "examples", "oop"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternbook-decorator = "patternbook.decorator:main"
patternbook-abstract-factory = "patternbook.abstract_factory:main"
patternbook-builder = "patternbook.builder:main"
patternbook-factory-method = "patternbook.factory_method:main"
patternbook-prototype = "patternbook.prototype:main"
patternbook-singleton = "patternbook.singleton:main"
patternbook-state = "patternbook.state:main"
patternbook-strategy = "patternbook.strategy:main"
patternbook-template-method = "patternbook.template_method:main"
patternbook-chain-of-responsibility = "patternbook.chain_of_responsibility:main"
patternbook-command = "patternbook.command:main"
patternbook-interpreter = "patternbook.interpreter:main"
patternbook-iterator = "patternbook.iterator:main"
patternbook-mediator = "patternbook.mediator:main"
patternbook-memento = "patternbook.memento:main"
patternbook-observer = "patternbook.observer:main"
patternbook-visitor = "patternbook.visitor:main"

[tool.hatch.build.targets.wheel]
packages = ["patternbook"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"

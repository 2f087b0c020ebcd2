[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linmodels"
version = "0.1.0"
description = "Small linear models: gradient-descent regression, closed-form least squares and a perceptron."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["linear regression", "perceptron", "least squares", "normal equations", "gradient descent"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
linmodels-linear = "linmodels.linear_model:main"
linmodels-regression = "linmodels.pseudo_inverse:main"
linmodels-perceptron = "linmodels.perceptron:main"

[tool.hatch.build.targets.wheel]
packages = ["linmodels"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

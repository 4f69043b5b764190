[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "materialcolor"
version = "0.1.0"
description = "Perceptual color science: CAM16, HCT, contrast, blending and dynamic color roles"
requires-python = ">=3.10"
dependencies = []
keywords = ["color", "cam16", "hct", "contrast", "blending", "theming"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["materialcolor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "b64tool"
version = "0.1.0"
description = "Base64 encoder and decoder with PEM/MIME line wrapping and a small desktop window"
requires-python = ">=3.10"
dependencies = []
keywords = ["base64", "encoding", "decoding", "pem", "mime", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.gui-scripts]
b64tool = "b64tool.app:main"

[tool.hatch.build.targets.wheel]
packages = ["b64tool"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslabs"
version = "0.1.0"
description = "Small operating-systems exercises: worker threads, marker threads, file-based message queues and binary employee records"
requires-python = ">=3.10"
dependencies = [
    "filelock",
]
keywords = [
    "threads",
    "synchronization",
    "ipc",
    "ring-buffer",
    "education",
    "operating-systems",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
test = [
    "pytest",
]

[project.scripts]
oslabs-array-stats = "oslabs.array_stats:main"
oslabs-markers = "oslabs.marker_cli:main"
oslabs-msg-receiver = "oslabs.message_app:receiver_main"
oslabs-msg-sender = "oslabs.message_app:sender_main"
oslabs-ring-receiver = "oslabs.ring_app:receiver_main"
oslabs-ring-sender = "oslabs.ring_app:sender_main"

[tool.hatch.build.targets.wheel]
packages = ["oslabs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

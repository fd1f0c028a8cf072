[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslabkit"
version = "0.1.0"
description = "Classic operating-system algorithms: CPU scheduling, FIFO paging, best-fit allocation, the banker's algorithm, a bounded buffer and dining philosophers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating-systems",
    "scheduling",
    "round-robin",
    "srtn",
    "fcfs",
    "bankers-algorithm",
    "page-replacement",
    "best-fit",
    "producer-consumer",
    "dining-philosophers",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Environment :: Console",
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
oslabkit-banker = "oslabkit.banker:main"
oslabkit-bestfit = "oslabkit.memory:main"
oslabkit-fifo = "oslabkit.paging:main"
oslabkit-buffer = "oslabkit.producer_consumer:main"
oslabkit-schedule = "oslabkit.scheduling:main"
oslabkit-philosophers = "oslabkit.philosophers:main"

[tool.hatch.build.targets.wheel]
packages = ["oslabkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toka"
version = "1.0.0"
description = "Chat, coder and tweeting agents over OpenAI-compatible chat completion APIs"
requires-python = ">=3.10"
keywords = ["llm", "agent", "chat", "chat-completion", "gpt4free", "twitter", "oauth1"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]
dependencies = [
    "httpx",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
    "respx",
]

[project.scripts]
toka = "toka.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["toka"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

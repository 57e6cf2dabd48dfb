from setuptools import setup, find_packages

setup(
    name="session-credential-service",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "fastapi",
        "pydantic[email]>=2",
        "pydantic-settings",
        "python-jose[cryptography]",
        "python-json-logger>=2.0,<4",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
)

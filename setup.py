from setuptools import setup, find_packages

setup(
    name="verdict",
    version="0.1.0",
    packages=find_packages(include=["verdict", "verdict.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.7",
        "pydantic-settings>=2.3",
        "httpx>=0.27",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
)

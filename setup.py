from setuptools import setup, find_packages

setup(
    name="termline",
    version="0.1.0",
    description="An interactive command-line session engine",
    packages=find_packages(include=["termline", "termline.*"]),
    install_requires=[
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    python_requires=">=3.10",
)

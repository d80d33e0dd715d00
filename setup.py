from setuptools import setup, find_packages

setup(
    name="authclient",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "httpx>=0.27",
        "pydantic>=2.0",
        "structlog>=24.1",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio>=0.23",
            "pytest-httpx>=0.30",
        ],
    },
    entry_points={
        "console_scripts": [
            "authclient=authclient.core.cli:main",
        ],
    },
    description="Session-refreshing HTTP API client with user-facing error notifications.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)

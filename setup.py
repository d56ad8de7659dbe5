"""Install the auth gateway package."""

from setuptools import setup, find_packages

setup(
    name='auth-gateway',
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.9',
    install_requires=[
        "boto3",
        "click",
        "fastapi",
        "pydantic>=2",
        "python-json-logger",
    ],
    extras_require={
        "test": [
            "httpx",
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        "console_scripts": [
            "auth-gateway=auth_gateway.cli:cli",
        ],
    },
    zip_safe=False
)

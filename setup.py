"""Packaging for the Beebotte Python SDK."""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="beebotte",
    version="1.0.0",
    author="Beebotte",
    author_email="contact@beebotte.com",
    description="Python SDK for the Beebotte IoT data platform",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/beebotte/bbt_python",
    project_urls={
        "Homepage": "https://beebotte.com",
        "Documentation": "https://beebotte.com/docs",
        "Source": "https://github.com/beebotte/bbt_python",
    },
    packages=find_packages(exclude=["tests", "examples"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: System :: Networking",
    ],
    keywords=[
        "iot", "beebotte", "sensors", "api", "sdk",
        "real-time", "data", "publish", "hmac"
    ],
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={
        "dev": [
            "pytest>=7.0",
            "black>=23.0",
            "mypy>=1.0",
            "pytest-cov>=4.0",
        ],
    },
    package_data={
        "beebotte": ["py.typed"],
    },
    include_package_data=True,
    zip_safe=False,
)

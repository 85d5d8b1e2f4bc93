from setuptools import find_packages, setup

setup(
    name="argmatch",
    version="0.1.0",
    description="Declarative command-line argument registry and single-pass matcher.",
    long_description=open("README.md", encoding="UTF-8").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(include=["argmatch", "argmatch.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich>=13.0",
        "python-json-logger>=3.1",
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "toml>=0.10",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)

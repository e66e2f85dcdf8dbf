from setuptools import find_packages, setup

setup(
    name="javaline",
    version="0.1.0",
    description="Scaffolding for lightweight Java projects",
    packages=find_packages(include=["javaline", "javaline.*"]),
    python_requires=">=3.11",
    install_requires=[
        "tomli-w>=1.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "javaline = javaline.cli:main",
        ],
    },
)

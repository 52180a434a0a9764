from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="bootup",
    version="0.1.0",
    description="JavaScript boot-up time audit for browser performance traces.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"bootup.schemas": ["*.json"]},
    python_requires=">=3.10",
    install_requires=["PyYAML", "jsonschema"],
    extras_require={"dev": ["pytest"]},
    tests_require=["pytest"],
    entry_points={"console_scripts": ["bootup=bootup.cli:main"]},
)

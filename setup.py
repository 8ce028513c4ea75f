import setuptools


with open("README.md", "r") as readme_file:
    readme = readme_file.read()

setuptools.setup(
    name="barpath",
    version="0.1.0",
    author="Petr Machek",
    description="Linear barcodes rendered as scalable vector paths",
    long_description=readme,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages("src"),
    package_dir={"": "src"},
    install_requires=["python-barcode>=0.15"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": ["barpath=barpath.cli:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.7"
)

import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="asset-stager",
    version="1.0.0",
    description="copies built package dist folders into a web-servable assets folder",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX",
    ],
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    package_data={
        "asset_stager": ["version.txt"],
    },
    entry_points={
        'console_scripts': [
            'asset-stager = asset_stager.cli:main',
            'copy-assets = asset_stager.cli:copy_assets',
        ]
    },
    python_requires=">=3.10",
    install_requires=[
        "pyyaml",
    ],
    extras_require={
        "test": ["pytest"],
    },
)

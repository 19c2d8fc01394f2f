from setuptools import find_packages, setup

setup(
    name="citebuilder",
    version="1.0.0",
    description="Fragment-gated citation text builder",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["citebuilder", "citebuilder.*"]),
    install_requires=[],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["citebuilder = citebuilder.cli:main"]},
)

from setuptools import setup, find_packages

setup(
    name="sqlwalk",
    version="0.1.0",
    description="SQL walkthrough runner over local SQLite sample databases",
    packages=find_packages(exclude=("tests", "tests.*")),
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "sqlalchemy>=1.4",
        "pandas>=1.3",
        "click>=8.0",
        "python-dotenv>=0.19",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "sqlwalk=sqlwalk.cli.main:main",
        ],
    },
)

from setuptools import setup, find_packages

setup(
    name="caltrain-status",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "beautifulsoup4",
        "html5lib",
        "pydantic>=2",
        "rich",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "caltrain-status=caltrain.cli:main",
        ],
    },
)

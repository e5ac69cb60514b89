from setuptools import setup, find_packages

setup(
    name="png_secret",
    version="0.1.0",
    description="Embed secret bytes in the least significant bits of PNG images",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pillow>=10.0.0",
        "numpy>=1.24.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "hypothesis>=6.88.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "png-secret=png_secret.main:cli",
        ],
    },
    python_requires=">=3.8",
)

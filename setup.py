from setuptools import setup, find_packages

setup(
    name="photostat",
    version="1.0.0",
    description="Guest photo uploads, develop countdown and text notification sign-up",
    author="Photostat Team",
    packages=find_packages(include=["photostat_commons", "photostat_commons.*"]),
    install_requires=[
        "boto3>=1.34.0",
        "pynamodb>=6.0.0",
        "Pillow>=10.0.0",
        "python-dotenv>=1.0.0",
        "requests>=2.31.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "moto[s3,dynamodb]>=5.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "photostat=photostat_commons.client.cli:main",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.12",
    ],
)

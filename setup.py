from setuptools import setup, find_packages

setup(
    name="html-renderer",
    version="1.0.0",
    description="Render JavaScript-heavy HTML through a headless browser over WebDriver",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "selenium>=4.26.0",
        "urllib3>=1.26",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
)

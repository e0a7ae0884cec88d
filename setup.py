from setuptools import setup, find_packages

setup(
    name="webactions",
    version="1.0.0",
    description="Selenium session bootstrap and interaction helpers for browser tests",
    author="Aluve Software",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "selenium>=4.27.0",
        "webdriver-manager>=4.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'webactions=webactions.__main__:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Framework :: Pytest",
    ],
    python_requires=">=3.8",
)

import setuptools

from emgateway import __version__

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="emgateway",
    version=__version__,
    author="emgateway contributors",
    description="Energy management gateway exposing controllable appliances and their planning requests over REST",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        'fastapi',
        'pydantic>=2.0',
        'pydantic-settings',
        'python-dotenv',
        'uvicorn',
    ],
    extras_require={
        'test': [
            'pytest',
            'httpx',
            'requests',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)

from setuptools import setup

setup(
    name="floatstep",
    version="0.1.0",
    packages=["stepping"],
    author="rakki194",
    author_email="acsipont@gmail.com",
    description="Step float64 values to their adjacent representable neighbor (nextafter, nextUp, nextDown).",
    url="https://github.com/rakki194/floatstep",
    license="MIT",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=[
        "torch>=2.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)

from setuptools import setup, find_packages

main_ns = {}
with open("src/xls_wrapper/_version.py") as ver_file:
    exec(ver_file.read(), main_ns)

setup(
    name="xls-wrapper",
    version=main_ns["__version__"],
    description="Read and write Excel 97-2003 workbooks with deduplicated cell formatting",
    license="MIT",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    entry_points={
        "console_scripts": [
            "cat-xls=xls_wrapper._cat_xls:main",
        ],
    },
    install_requires=["enum-tools", "pendulum", "xlrd>=2.0", "xlwt"],
    extras_require={
        "test": ["pytest", "pytest-check", "pytest-console-scripts"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
)

"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='minipol-lang',
	version='0.1.0',
	packages=['minipol', ],
	license='MIT',
	description='Evaluation core of a small language for writing spending policies',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.12",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Interpreters",
		"Topic :: Software Development :: Compilers",
	],
	python_requires='>=3.12',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
	extras_require={
		'test': ["pytest"],
	},
)

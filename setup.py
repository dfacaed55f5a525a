"""
Packaging script for PyPI.
"""
import setuptools
from pathlib import Path

try:
	from boozetools.macroparse.runtime import make_tables
except ImportError:
	pass
else:
	make_tables(Path(__file__).parent / "lispy" / "Lispy.md")

setuptools.setup(
	name='lispy',
	version='0.0.1',
	packages=['lispy'],
	package_data={
		'lispy': ["Lispy.md", "Lispy.automaton"],
	},
	entry_points={
		'console_scripts': ["lispy = lispy.cmdline:main"],
	},
	license='MIT',
	description='The value model and evaluator of a very small prefix-arithmetic Lisp',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Interpreters",
		"Topic :: Education",
		"Environment :: Console",
	],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
)

import setuptools

setuptools.setup(
	name='fast-forms',
	version='1.0.0',
	packages=[
		'fastforms',
		'fastforms.forms',
		'fastforms.parsing',
		'fastforms.support',
	],
	description='A terse, line-oriented notation for HTML5 forms, and the recursive-descent machinery to read it',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	extras_require={'test': ['pytest']},
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Code Generators",
		"Topic :: Text Processing :: Markup :: HTML",
		"Development Status :: 3 - Alpha",
	],
)

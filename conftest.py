""" Lets pytest find the fastforms package from a plain checkout. """

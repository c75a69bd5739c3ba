"""Identity domain: the User aggregate and its collaborator interfaces."""

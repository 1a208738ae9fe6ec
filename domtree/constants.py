ID_ATTRIBUTE = "id"
CLASS_ATTRIBUTE = "class"

# class="a  b" keeps the empty token between the two spaces
CLASS_SEPARATOR = " "

INDENT_STEP = 2

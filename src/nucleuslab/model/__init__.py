"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt) or the Visualization (pyqtgraph).
It deals with nucleon layout, element lookup and the quiz session.
"""

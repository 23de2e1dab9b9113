"""
Notizen & Quiz – UI-unabhängiger Kern.

Zweck:
    Dieses Paket bündelt die fachliche Logik der Notiz-App ohne Oberfläche und
    dokumentiert die Schichtenarchitektur (Service → Repository → Model).

Inhalt:
    - Service-Schicht: `NoteStore` (CRUD auf Notizen, Validierung)
    - Repository-Schicht: SQL/CRUD auf SQLite (`NoteRepository`)
    - Model-Schicht: Datenklassen (`Note`, `Question`, `QuizSession`)
    - Quiz: statischer Fragenkatalog und zustandsloser Reducer (`QuizEngine`)
    - Login: austauschbare Prüfung von Zugangsdaten (`CredentialVerifier`)

Hinweise:
    Die Oberfläche (Screens, Navigation, Widgets) ist nicht Teil dieses Pakets.
    Sie ruft ausschließlich `NoteStore`, `QuizEngine` und `CredentialVerifier` auf.
"""

__all__ = []

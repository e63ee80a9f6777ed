"""Built-in question bank used when no questions file is available.

Common Linux administration questions in Spanish, in the order they are
listed to the user.
"""

from __future__ import annotations

from typing import Sequence, Tuple


def default_qa_bank() -> Sequence[Tuple[str, str]]:
    """Return the built-in ``(question, answer)`` pairs."""
    return [
        (
            "¿Cuál es la diferencia entre ls, ls -l y ls -a?",
            "ls lista archivos, ls -l muestra detalles y ls -a incluye archivos ocultos.",
        ),
        (
            "¿Para qué sirve el comando pwd?",
            "Muestra la ruta del directorio actual.",
        ),
        (
            "¿cual es el demonio que gestiona los servicios de Linux?",
            "systemd",
        ),
        (
            "Cual es el comando utilizado para mostrar el directorio de trabajo actual en la terminal de Linux?",
            "pwd",
        ),
        (
            "¿cual es el comando utilizado para enumerar los archivos en un directorio en Linux?",
            "ls",
        ),
        (
            "¿Cuál es el comando para mostrar información de uso de memoria en Linux?",
            "free",
        ),
        (
            "¿cual es el comando para iniciar un servicio en Linux usando systemd?",
            "systemctl start <nombre-del-servicio>",
        ),
        (
            "¿cual es el comando para enumerar todos los grupos en Linux?",
            "cat /etc/group",
        ),
        (
            "¿cual es el comando para detener un servicio en Linux usando systemd?",
            "systemctl stop <nombre-del-servicio>",
        ),
        (
            "Cual es el demonio responsable de montar dispositivos automáticamente en Linux?",
            "autofs",
        ),
        (
            "¿cual es la base de la filosofía del software libre de Linux?",
            "Compartir y colaborar",
        ),
        (
            "Cual es el comando para mover un archivo a otro directorio en Linux?",
            "mv",
        ),
        (
            "¿cual es el archivo que contiene la configuración de resolución de pantalla en Linux?",
            "/etc/X11/xorg.conf",
        ),
        (
            "¿cual es el archivo que almacena las contraseñas de los usuarios en Linux?",
            "/etc/shadow",
        ),
        (
            "¿cual es el comando para copiar un archivo en Linux?",
            "cp",
        ),
        (
            "¿cual es el archivo que contiene la configuración del entorno global para todos los usuarios?",
            "/etc/profile",
        ),
        (
            "¿cual es el comando para enumerar todos los procesos que se ejecutan en el sistema en Linux?",
            "ps",
        ),
        (
            "¿Cual es el archivo o ruta que contiene información sobre dispositivos de hardware en Linux?",
            "/sys/devices",
        ),
        (
            "¿cual es el comando para cambiar el directorio actual a un directorio especifico en Linux?",
            "cd",
        ),
        (
            "¿cual es el archivo que contiene la configuración de la impresora en Linux?",
            "/etc/cups",
        ),
        (
            "¿cual es el archivo que contiene la configuración de red para systemd en Linux?",
            "No existe un archivo único; la configuración de red para systemd se encuentra en /etc/systemd/network/",
        ),
        (
            "¿cual es el comando para mostrar información sobre dispositivos de red en Linux?",
            "ifconfig",
        ),
        (
            "¿cual es el comando para eliminar un archivo en Linux?",
            "rm",
        ),
        (
            "¿cual es la utilidad que se utiliza para comprimir archivos en formato .tar.gz en Linux?",
            "tar",
        ),
        (
            "¿cual es el comando para iniciar un programa en Linux desde la terminal?",
            "Escribir el nombre del programa",
        ),
        (
            "¿cual es el comando que se utiliza para cambiar los permisos de un archivo en Linux?",
            "chmod",
        ),
        (
            "¿cual es el archivo que contiene la información sobre los paquetes instalados en Linux (en sistemas basados en debian)?",
            "/var/lib/dpkg/status",
        ),
        (
            "¿cual es el comando para formatear una partición en Linux?",
            "mkfs",
        ),
        (
            "¿cual es el comando para crear un nuevo directorio en Linux?",
            "mkdir",
        ),
        (
            "¿cual es el comando que se utiliza para cambiar la contraseña de un usuario en Linux?",
            "passwd",
        ),
        (
            "¿cual es el comando para montar una partición en Linux?",
            "mount",
        ),
        (
            "¿cual es el comando para cambiar el grupo de un archivo en Linux?",
            "chgrp",
        ),
        (
            "¿cual es el comando para mostrar información de configuración de red en Linux?",
            "ifconfig",
        ),
        (
            "¿cual es el comando para matar un proceso especifico en Linux?",
            "kill",
        ),
        (
            "¿cual es el comando para cambiar el nombre de un archivo en Linux?",
            "mv",
        ),
        (
            "¿cuál es el comando que se utiliza para mostrar información sobre las particiones del sistema en Linux?",
            "lsblk",
        ),
        (
            "¿cuál es el comando para enumerar todos los archivos en un directorio y sus subcarpetas en Linux?",
            "ls -R",
        ),
        (
            "¿cuál es el archivo que contiene configuración de hosts en Linux?",
            "/etc/hosts",
        ),
        (
            "¿cuál es el comando para enumerar todos los paquetes instalados en Linux (usando dpkg)?",
            "dpkg -l",
        ),
        (
            "¿cómo se obtiene la información de configuración de hardware en Linux?",
            "lshw",
        ),
        (
            "¿cuál es el archivo que almacena los permisos de un directorio en Linux?",
            "No existe un archivo especifico; los permisos se almacenan en el sistema de archivos",
        ),
        (
            "¿cuál es el comando para cambiar el propietario de un archivo en Linux?",
            "chown",
        ),
        (
            "¿cuál es el comando para instalar un paquete de Linux usando el sistema de administración de paquetes dpkg?",
            "dpkg -i <paquete.deb>",
        ),
        (
            "¿cuál es el comando para enumerar los paquetes instalados en una distribución de Linux?",
            "dpkg -l",
        ),
        (
            "¿cuál es el comando para agregar un usuario a un grupo de Linux?",
            "usermod -aG <grupo> <usuario>",
        ),
        (
            "¿cuál es el comando para mostrar información sobre la utilización de la CPU en Linux?",
            "top",
        ),
        (
            "¿cuál es el comando para otorgar permisos de escritura, lectura y ejecución a un archivo en Linux?",
            "chmod 777 <archivo>",
        ),
        (
            "¿Cuál es el comando utilizado para crear un nuevo usuario en Linux?",
            "adduser",
        ),
        (
            "¿Qué comando muestra el espacio libre en disco?",
            "df -h",
        ),
        (
            "¿Dónde se almacenan los logs del sistema?",
            "/var/log",
        ),
        (
            "¿Qué hace el comando tar?",
            "Comprime y descomprime archivos",
        ),
        (
            "¿Qué es el kernel?",
            "Núcleo del sistema operativo",
        ),
    ]
